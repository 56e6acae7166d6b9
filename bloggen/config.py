# bloggen/config.py
import os

DEFAULT_HF_MODEL = "meta-llama/Llama-3.1-8B-Instruct"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"


def getenv_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, "").strip())
    except Exception:
        return default


def getenv_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, "").strip())
    except Exception:
        return default


def database_url() -> str:
    db_url = os.getenv("DATABASE_URL") or "sqlite:///local.db"
    if db_url.startswith("postgres://"):
        db_url = db_url.replace("postgres://", "postgresql+psycopg2://", 1)
    return db_url


def load_config() -> dict:
    """Collect app settings from the environment (call after load_dotenv)."""
    backend = (os.getenv("LLM_BACKEND") or "hf").strip().lower()
    default_model = DEFAULT_OPENAI_MODEL if backend == "openai" else DEFAULT_HF_MODEL
    return {
        "SQLALCHEMY_DATABASE_URI": database_url(),
        "DATABASE_URL_SET": bool(os.getenv("DATABASE_URL")),
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "LLM_BACKEND": backend,
        "HF_TOKEN": os.getenv("HF_TOKEN") or os.getenv("HF_API_KEY"),
        "OPENAI_API_KEY": os.getenv("OPENAI_API_KEY") or os.getenv("OPENAI_KEY"),
        "MODEL_NAME": (os.getenv("MODEL_NAME") or default_model).strip(),
        "MAX_TOKENS": getenv_int("MAX_TOKENS", 800),
        "TEMPERATURE": getenv_float("TEMPERATURE", 0.6),
        "PORT": getenv_int("PORT", 5000),
        "DIAGNOSE_TOKEN": (os.getenv("DIAGNOSE_TOKEN") or "").strip(),
        "LOG_LEVEL": (os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    }
