"""Cox-Ross-Rubenstein binomial pricing for European options."""
