# -*- coding: utf-8 -*-
"""
License Service Abstraction Layer.

The license wizard installs, displays and uninstalls licenses through the
LicenseManager interface. Where and how licenses are stored is up to the
implementation supplied by the host application:
- MemoryLicenseManager: Keeps the license in memory (development, tests)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

from services.exceptions import LicenseException
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class LicenseContent:
    """Content of an installed license."""
    subject: str
    holder: Optional[str] = None
    issuer: Optional[str] = None
    issued: Optional[datetime] = None
    not_after: Optional[datetime] = None
    info: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "subject": self.subject,
            "holder": self.holder,
            "issuer": self.issuer,
            "issued": self.issued.isoformat() if self.issued else None,
            "not_after": self.not_after.isoformat() if self.not_after else None,
            "info": self.info,
            "extra": self.extra
        }


@dataclass
class LicenseInstalledEvent:
    """A license was installed."""
    source: Any
    content: LicenseContent


@dataclass
class LicenseUninstalledEvent:
    """The installed license was removed."""
    source: Any


class LicenseManager(ABC):
    """
    Abstract license store.

    Implementations raise LicenseException when an operation fails.
    """

    @property
    @abstractmethod
    def subject(self) -> str:
        """Name of the licensed product."""
        pass

    @abstractmethod
    def install(self, path: Union[str, Path]) -> LicenseContent:
        """Install the license key stored in a file."""
        pass

    @abstractmethod
    def verify(self) -> LicenseContent:
        """Verify the installed license and return its content."""
        pass

    @abstractmethod
    def uninstall(self):
        """Remove the installed license."""
        pass


class MemoryLicenseManager(LicenseManager):
    """
    License store that keeps the installed license in memory.

    Any existing file is accepted as license key.
    """

    def __init__(self, subject: str, holder: Optional[str] = None):
        self._subject = subject
        self._holder = holder
        self._content: Optional[LicenseContent] = None

    @property
    def subject(self) -> str:
        return self._subject

    def install(self, path: Union[str, Path]) -> LicenseContent:
        key_file = Path(path)
        if not key_file.is_file():
            raise LicenseException(f"License key file not found: {key_file}", context="install")

        self._content = LicenseContent(
            subject=self._subject,
            holder=self._holder,
            issued=datetime.now(),
            info=key_file.name
        )
        logger.info(f"Installed license for {self._subject} from {key_file}")
        return self._content

    def verify(self) -> LicenseContent:
        if self._content is None:
            raise LicenseException(f"No license installed for {self._subject}", context="verify")
        return self._content

    def uninstall(self):
        if self._content is None:
            raise LicenseException(f"No license installed for {self._subject}", context="uninstall")
        self._content = None
        logger.info(f"Uninstalled license for {self._subject}")
