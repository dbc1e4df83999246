import os
from dotenv import load_dotenv
load_dotenv()

LOG_NAME = os.getenv("PWCODEC_LOG_NAME", "pwcodec")
LOG_MODE = os.getenv("PWCODEC_LOG_MODE", "production")
LOG_FILES = [p.strip() for p in os.getenv("PWCODEC_LOG_FILES", "stderr").split(",") if p.strip()]

# Rotación: si hay fichero configurado sustituye a LOG_FILES
LOG_ROLL_FILE = os.getenv("PWCODEC_LOG_ROLL_FILE", "")
LOG_ROLL_MAX_MB = int(os.getenv("PWCODEC_LOG_ROLL_MAX_MB", "100"))
LOG_ROLL_BACKUPS = int(os.getenv("PWCODEC_LOG_ROLL_BACKUPS", "5"))
_max_age = os.getenv("PWCODEC_LOG_ROLL_MAX_AGE_DAYS", "")
LOG_ROLL_MAX_AGE_DAYS = float(_max_age) if _max_age else None
LOG_ROLL_COMPRESS = os.getenv("PWCODEC_LOG_ROLL_COMPRESS", "false").lower() in ("1", "true", "yes")

# Muestreo "initial,thereafter,tick_seconds"; vacío lo desactiva
LOG_SAMPLING = os.getenv("PWCODEC_LOG_SAMPLING", "")
