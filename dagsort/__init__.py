# dagsort

from dagsort.graph import (ChildLookupError, CycleError, InvalidProviderError,
                           NodeProvider, sort)
from dagsort.providers import AdjacencyProvider, MappingProvider, tsort
