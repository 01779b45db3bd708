"""paramscan - bind query strings and form bodies to typed Python values"""

from ._version import version as __version__
from .args import Args
from .decode import decode, missing_params, require_params
from .errors import (
    CoercionError,
    DecodeError,
    KeySyntaxError,
    MissingParamError,
    ParamScanError,
    ScanError,
    TargetError,
)
from .nested import merge, query_to_map, split_key, to_json, to_tree, unmarshal_args
from .scan import UInt, scan_args


__all__ = [
    "Args",
    "CoercionError",
    "DecodeError",
    "KeySyntaxError",
    "MissingParamError",
    "ParamScanError",
    "ScanError",
    "TargetError",
    "UInt",
    "__version__",
    "decode",
    "merge",
    "missing_params",
    "query_to_map",
    "require_params",
    "scan_args",
    "split_key",
    "to_json",
    "to_tree",
    "unmarshal_args",
]
