from pathlib import Path
import os
from dotenv import load_dotenv

load_dotenv()

_ROOT_DIR = Path(__file__).resolve().parents[2]
_DEFAULT_NETWORK = Path(__file__).resolve().parent / "core" / "data" / "network.json"

def _resolve_path(key: str, default: Path) -> Path:
    raw_value = os.getenv(key)
    if not raw_value:
        return default
    path = Path(raw_value)
    if not path.is_absolute():
        path = _ROOT_DIR / path
    return path

NETWORK_PATH = _resolve_path("NETWORK_PATH", _DEFAULT_NETWORK)
OUTPUTS_DIR = _resolve_path("OUTPUTS_DIR", _ROOT_DIR / "outputs")
DEFAULT_WEIGHT = os.getenv("DEFAULT_WEIGHT", "hops").lower()
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

def ensure_directories() -> None:
    OUTPUTS_DIR.mkdir(parents=True, exist_ok=True)
