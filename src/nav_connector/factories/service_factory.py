"""
Service Factories

Bind a shared HTTP client to generic OData or SOAP services per entity type.
"""

from abc import ABC, abstractmethod
from typing import Optional, Type, TypeVar

import httpx
import structlog
from pydantic import BaseModel

from ..models import entity_name_of
from ..services import INavODataService, GenericODataService, INavSoapService, GenericSoapService

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


class INavODataServiceFactory(ABC):
    """Interface for creating OData services"""

    @abstractmethod
    def create(self, model_cls: Type[T], service_name: Optional[str] = None) -> INavODataService[T]:
        """
        Create a service for entities of ``model_cls``.

        Args:
            model_cls: The entity model type
            service_name: Published OData service name (defaults to the entity name)

        Returns:
            OData service bound to the shared client
        """
        pass


class INavSoapServiceFactory(ABC):
    """Interface for creating SOAP services"""

    @abstractmethod
    def create(self, model_cls: Type[T], service_name: Optional[str] = None) -> INavSoapService[T]:
        """
        Create a service for SOAP records of ``model_cls``.

        Args:
            model_cls: The record model type
            service_name: Published SOAP service name (defaults to the entity name)

        Returns:
            SOAP service bound to the shared client
        """
        pass


class NavODataServiceFactory(INavODataServiceFactory):
    """Creates GenericODataService instances over one OData client"""

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    def create(self, model_cls: Type[T], service_name: Optional[str] = None) -> INavODataService[T]:
        name = service_name or entity_name_of(model_cls)
        logger.debug("Creating OData service", service=name, model=model_cls.__name__)
        return GenericODataService(self.http, name, model_cls)


class NavSoapServiceFactory(INavSoapServiceFactory):
    """Creates GenericSoapService instances over one SOAP client"""

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    def create(self, model_cls: Type[T], service_name: Optional[str] = None) -> INavSoapService[T]:
        name = service_name or entity_name_of(model_cls)
        logger.debug("Creating SOAP service", service=name, model=model_cls.__name__)
        return GenericSoapService(self.http, name, model_cls)
