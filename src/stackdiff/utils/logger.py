import logging, pathlib, sys
from .config import get_settings

def get_logger(name: str) -> logging.Logger:
    settings = get_settings()
    logger = logging.getLogger(f"stackdiff.{name}")
    if not logger.handlers:
        logger.setLevel(settings.log_level)
        fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")
        # stdout is reserved for the rendered table
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(fmt)
        logger.addHandler(ch)
        if settings.log_dir:
            log_dir = pathlib.Path(settings.log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_dir / f"{name}.log", encoding="utf-8")
            fh.setFormatter(fmt)
            logger.addHandler(fh)
        logger.propagate = False
    return logger
