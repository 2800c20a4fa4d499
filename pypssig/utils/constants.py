import ctypes
import ctypes.util
import logging
import os

from dotenv import load_dotenv

_logger = logging.getLogger(__name__)

# src/bn_c384_256.cpp
MCLBN_FP_UNIT_SIZE: int = 6
MCLBN_FR_UNIT_SIZE: int = 4

# include/lib/curve_type.h
MCL_BLS12_381: int = 5

# include/lib/bn.h
MCLBN_COMPILED_TIME_VAR: int = MCLBN_FR_UNIT_SIZE * 10 + MCLBN_FP_UNIT_SIZE

# Domain separation suffixes appended to the params label
G1_LABEL_SUFFIX: bytes = b" : g"
G2_LABEL_SUFFIX: bytes = b" : g_tilde"

load_dotenv()

project_root = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)
mcl_build_lib = os.path.join(project_root, "mcl", "build", "lib")

LIB_PATH: str = os.environ.get("MCL_LIB_PATH", mcl_build_lib)
MCL_LIB: str = "libmcl.so"
MCL384_LIB: str = "libmclbn384_256.so"
lib: ctypes.CDLL | None = None


def _find(name: str) -> str:
    path = os.path.join(LIB_PATH, name)
    if os.path.exists(path):
        return path
    _logger.warning("%s does not exist, trying the system loader", path)
    # libmclbn384_256.so -> mclbn384_256
    found = ctypes.util.find_library(name[3:].split(".")[0])
    return found or name


def load_library() -> None:
    global lib
    if lib is not None:
        return
    if not LIB_PATH:
        raise RuntimeError("Environment variable MCL_LIB_PATH missing.")

    _logger.info("Loading MCL libraries from: %s", LIB_PATH)
    try:
        ctypes.CDLL(_find(MCL_LIB))
        handle = ctypes.CDLL(_find(MCL384_LIB))
    except OSError as e:
        raise RuntimeError(f"mcl library could not be loaded: {e}") from e
    if handle.mclBn_init(MCL_BLS12_381, MCLBN_COMPILED_TIME_VAR):
        raise RuntimeError("mcl library could not be initialized")
    lib = handle
