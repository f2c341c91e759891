from .accessors import RepositoryAccessorMixin, RepositoryProtocol, SoftDeleteRepositoryProtocol
from .create import CreateServiceMixin
from .delete import DeleteServiceMixin, SoftDeleteServiceMixin
from .executor import ExecutorMixin
from .listing import ListingServiceMixin
from .pagination import PaginationServiceMixin
from .payload import PayloadMixin
from .retrieval import RetrievalServiceMixin
from .serializer import SerializerMixin, SerializerProtocol
from .update import UpdateServiceMixin

__all__ = [
    'CreateServiceMixin',
    'DeleteServiceMixin',
    'ExecutorMixin',
    'ListingServiceMixin',
    'PaginationServiceMixin',
    'PayloadMixin',
    'RepositoryAccessorMixin',
    'RepositoryProtocol',
    'RetrievalServiceMixin',
    'SerializerMixin',
    'SerializerProtocol',
    'SoftDeleteRepositoryProtocol',
    'SoftDeleteServiceMixin',
    'UpdateServiceMixin',
]
