import importlib
import logging


logger = logging.getLogger(__name__)

# cffi bindings that ship libsecp256k1 built with the recovery module
BINDINGS = (
    "coincurve._libsecp256k1",
)


def discover_library():
    for name in BINDINGS:
        try:
            module = importlib.import_module(name)
        except ImportError:
            logger.debug("secp256k1 binding %s is not importable", name)
            continue
        return module.ffi, module.lib
    raise OSError("libsecp256k1 is unavailable")
