# dagsort.providers

from typing import (Any, Callable, Dict, Hashable, Iterable, List, Mapping,
                    Optional)

from dagsort.graph import ChildLookupError, NodeProvider, sort

Normalize = Callable[[Iterable[Any]], Iterable[Any]]

class AdjacencyProvider(NodeProvider[Any, Hashable]):
    '''Node provider over a callable returning the children of a vertex.

    The children of each vertex are computed once and kept for the lifetime
    of the provider, in the order produced by 'normalize'.  Vertices are their
    own identifiers unless an 'identify' callable is supplied.
    '''
    def __init__(self,
                 adjacencies: Callable[[Any], Iterable[Any]],
                 normalize:   Normalize=list,
                 identify:    Optional[Callable[[Any], Hashable]]=None) -> None:
        self._adjacencies = adjacencies
        self._normalize   = normalize
        self._identify    = identify
        self._children: Dict[Hashable, List[Any]] = {}

    def _lookup(self, vertex: Any) -> List[Any]:
        key = self.identify(vertex)
        if key not in self._children:
            self._children[key] = list(self._normalize(
                                                   self._adjacencies(vertex)))
        return self._children[key]

    def identify(self, vertex: Any) -> Hashable:
        if self._identify is None:
            return vertex
        return self._identify(vertex)

    def child_count(self, vertex: Any) -> int:
        return len(self._lookup(vertex))

    def child(self, vertex: Any, index: int) -> Any:
        children = self._lookup(vertex)
        if not 0 <= index < len(children):
            raise ChildLookupError(f'{vertex} has no child at index {index}')
        return children[index]

class MappingProvider(AdjacencyProvider):
    '''Node provider over a mapping from vertex to its children.  Every
    vertex, leaves included, must be a key of the mapping.'''
    def __init__(self,
                 mapping:   Mapping[Hashable, Iterable[Hashable]],
                 normalize: Normalize=list) -> None:
        AdjacencyProvider.__init__(self, self._adjacent, normalize)
        self._mapping = mapping

    def _adjacent(self, vertex: Hashable) -> Iterable[Hashable]:
        try:
            return self._mapping[vertex]
        except KeyError:
            raise ChildLookupError(vertex)

    def child(self, vertex: Hashable, index: int) -> Hashable:
        child = AdjacencyProvider.child(self, vertex, index)
        if child not in self._mapping:
            raise ChildLookupError(child, vertex)
        return child

def tsort(nodes:       Iterable[Any],
          adjacencies: Callable[[Any], Iterable[Any]],
          normalize:   Normalize=lambda x: x) -> List[Any]:
    '''Return the specified 'nodes' and everything reachable from them
    through 'adjacencies', each node before the nodes it is adjacent to.'''
    provider = AdjacencyProvider(adjacencies, normalize)
    return list(reversed(sort(provider, normalize(nodes))))
