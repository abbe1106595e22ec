from ._config import Config, get_config, set_config
from ._depreciation import deprecated
from ._eltype import ElType, eltype_of, typejoin
from ._format import seq_repr
from ._main import Pipeable

__all__ = [
    "Config",
    "ElType",
    "Pipeable",
    "deprecated",
    "eltype_of",
    "get_config",
    "seq_repr",
    "set_config",
    "typejoin",
]
