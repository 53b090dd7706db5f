# dagsort.config

import copy
from typing import Any, Dict, Mapping

class MergeError(RuntimeError):
    pass

def _key_present(mapping: Mapping, key: Any) -> bool:
    try:
        # this is due to 'defaultdict' returning false for 'key in dict'
        mapping[key]
    except KeyError:
        pass
    return key in mapping

def _combine(key: Any, source: Any, extension: Any) -> Any:
    source_is_mapping    = isinstance(source, Mapping)
    extension_is_mapping = isinstance(extension, Mapping)
    if source_is_mapping and extension_is_mapping:
        return merge(source, extension)
    if source_is_mapping or extension_is_mapping:
        raise MergeError(key)
    try:
        return copy.copy(source + extension)
    except TypeError:
        raise MergeError(key)

def merge(source: Mapping, extension: Mapping) -> Dict:
    '''Return the recursive union of the specified 'source' and 'extension'.
    Nested mappings are merged and other values present in both are
    concatenated, 'source' first.  Neither argument is modified.  Raise
    'MergeError' naming the key whose values cannot be combined.'''
    result = copy.copy(source)
    for k in extension.keys():
        if _key_present(source, k):
            result[k] = _combine(k, source[k], extension[k])
        else:
            result[k] = copy.copy(extension[k])
    return result
