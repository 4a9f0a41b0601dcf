from pathlib import Path

ROOT = Path(__file__).resolve().parents[3]

CONFIG_ROOT = ROOT / "config"
DEFAULT_CONVERGENCE_CONFIG = CONFIG_ROOT / "convergence.yml"

REPORTS_ROOT = ROOT / "reports"
CONVERGENCE_REPORTS = REPORTS_ROOT / "convergence"
