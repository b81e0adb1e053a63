# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import RepositoryProvider, UserProvider


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Repositories (RepositoryProvider) - the in-memory user store
    2. Services (UserProvider) - depend on repositories
    
    Each application builds its own container, so two apps never share a
    store.
    """
    
    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: repositories → services
        """
        self.register_singleton(Settings, self.settings)
        RepositoryProvider.register(self)
        UserProvider.register(self)
