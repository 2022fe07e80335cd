import os, logging, yaml

logger = logging.getLogger(__name__)

CFG_DIR  = os.path.join(os.path.expanduser("~"), ".lomo")
CFG_PATH = os.path.join(CFG_DIR, "config.yaml")

DEFAULT_CFG = {
    "backend": "qt",
    "output_path": "lomography_result.jpg",
    "jpeg_quality": 95,
}

def config_path(path=None):
    return path or os.getenv("LOMO_CONFIG") or CFG_PATH

def read_config(path=None):
    path = config_path(path)
    if not os.path.exists(path):
        return DEFAULT_CFG.copy()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Could not read config %s, using defaults: %s", path, e)
        return DEFAULT_CFG.copy()
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a mapping", path)
        return DEFAULT_CFG.copy()
    # fill defaults for any missing keys
    for k, v in DEFAULT_CFG.items():
        data.setdefault(k, v)
        data[k] = _coerce(path, k, data[k])
    return data

def _coerce(path, key, value):
    default = DEFAULT_CFG[key]
    if isinstance(default, str):
        if isinstance(value, str) and value:
            return value
    else:
        try:
            value = int(value)
        except (TypeError, ValueError):
            pass
        else:
            if 0 <= value <= 100:
                return value
    logger.warning("Bad %s %r in config %s, using %r", key, value, path, default)
    return default
