# dagsort.graph

import abc
import enum
from typing import Dict, Generic, Hashable, Iterable, List, TypeVar

Vertex = TypeVar('Vertex')
Id     = TypeVar('Id', bound=Hashable)

class InvalidProviderError(RuntimeError):
    pass

class ChildLookupError(RuntimeError):
    pass

class CycleError(RuntimeError):
    def __init__(self, path: List) -> None:
        RuntimeError.__init__(self, path)
        self.path = path

    def __str__(self) -> str:
        return 'not a dag: {}'.format(' -> '.join(str(v) for v in self.path))

class NodeProvider(Generic[Vertex, Id]):
    @abc.abstractmethod
    def identify(self, vertex: Vertex) -> Id:
        '''Return an identifier for the specified 'vertex'.  Two vertices are
        the same node if and only if their identifiers compare equal.'''

    @abc.abstractmethod
    def child_count(self, vertex: Vertex) -> int:
        '''Return the number of children of the specified 'vertex'.'''

    @abc.abstractmethod
    def child(self, vertex: Vertex, index: int) -> Vertex:
        '''Return the child at the specified 'index' of the specified
        'vertex'.  Raise 'ChildLookupError' if the child cannot be
        resolved.'''

class _State(enum.Enum):
    OPEN   = 1
    CLOSED = 2

def _visit(provider: NodeProvider[Vertex, Id],
           root:     Vertex,
           state:    Dict[Id, _State],
           result:   List[Vertex]) -> None:
    # each frame is [vertex, id, next child index]; the frame vertices are
    # the path from 'root' to the vertex on top
    stack: List[list] = []

    def enter(vertex: Vertex) -> None:
        ident = provider.identify(vertex)
        status = state.get(ident)
        if status is _State.OPEN:
            raise CycleError([frame[0] for frame in stack] + [vertex])
        if status is _State.CLOSED:
            return

        state[ident] = _State.OPEN
        stack.append([vertex, ident, 0])

    enter(root)
    while stack:
        frame = stack[-1]
        vertex, ident, index = frame
        if index < provider.child_count(vertex):
            frame[2] = index + 1
            enter(provider.child(vertex, index))
        else:
            stack.pop()
            state[ident] = _State.CLOSED
            result.append(vertex)

def sort(provider: NodeProvider[Vertex, Id],
         roots:    Iterable[Vertex]) -> List[Vertex]:
    '''Return the vertices reachable from the specified 'roots' in
    topological order, every child before its parent.  Raise
    'InvalidProviderError' if the specified 'provider' is 'None' and
    'CycleError' if a cycle is reachable.  Exceptions raised by 'provider'
    propagate unchanged.'''
    if provider is None:
        raise InvalidProviderError('provider should be a valid reference')

    state: Dict[Id, _State] = {}
    result: List[Vertex]    = []

    for root in roots:
        _visit(provider, root, state, result)

    return result
