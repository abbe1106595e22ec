from ._bounded import Cycle, Drop, Take, TakeStrict
from ._combine import Chain, IMap, Product
from ._core import Config, ElType, Pipeable, get_config, set_config, typejoin
from ._errors import EmptyCycleError, SequenceExhaustedError, ShortSequenceError
from ._factories import (
    chain,
    collect,
    count,
    cycle,
    distinct,
    drop,
    groupby,
    imap,
    into_seq,
    iterate,
    partition,
    product,
    repeat,
    repeated,
    repeatedly,
    subsets,
    take,
    takestrict,
)
from ._filters import Distinct, SeenMemo
from ._partitions import GroupBy, Partition, Subsets
from ._protocol import LazySeq
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._sources import (
    Count,
    Items,
    Iterate,
    Repeat,
    Repeatedly,
    RepeatedlyForever,
    RepeatForever,
    Stream,
)

__all__ = [
    "NONE",
    "Chain",
    "Config",
    "Count",
    "Cycle",
    "Distinct",
    "Drop",
    "ElType",
    "EmptyCycleError",
    "GroupBy",
    "IMap",
    "Items",
    "Iterate",
    "LazySeq",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Partition",
    "Pipeable",
    "Product",
    "Repeat",
    "RepeatForever",
    "Repeatedly",
    "RepeatedlyForever",
    "SeenMemo",
    "SequenceExhaustedError",
    "ShortSequenceError",
    "Some",
    "Stream",
    "Subsets",
    "Take",
    "TakeStrict",
    "chain",
    "collect",
    "count",
    "cycle",
    "distinct",
    "drop",
    "get_config",
    "groupby",
    "imap",
    "into_seq",
    "iterate",
    "partition",
    "product",
    "repeat",
    "repeated",
    "repeatedly",
    "set_config",
    "subsets",
    "take",
    "takestrict",
    "typejoin",
]
