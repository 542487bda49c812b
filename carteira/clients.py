"""
Client identity module for carteira.

Purpose
-------
Defines the two legal-person kinds that may own investments. Clients are
immutable identity records: they carry a name, an e-mail and a
kind-specific tax document, and never track the investments they own.

Key components
--------------
- Client:
    Abstract base exposing ``name``, ``email``, ``document_id`` and ``kind``.
- IndividualClient:
    Natural person identified by a CPF.
- CorporateClient:
    Legal entity identified by a CNPJ.

Design principles
-----------------
- Closed variant set: ``kind`` is one of ``ClientKind``
- Identity semantics: two clients with identical fields are still different
  owners (``eq=False``), so portfolio membership compares objects, not data
- Immutable: frozen dataclasses

Example
-------
>>> joao = IndividualClient("João Silva", "joao@email.com", cpf="123.456.789-00")
>>> joao.document_id
'123.456.789-00'
>>> joao.kind
'individual'
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Literal

from .utils import check_not_blank

__all__ = [
    "ClientKind",
    "Client",
    "IndividualClient",
    "CorporateClient",
]


ClientKind = Literal["individual", "corporate"]


@dataclass(frozen=True, eq=False)
class Client(ABC):
    """
    Abstract investment owner.

    Parameters
    ----------
    name : str
        Display name (non-empty).
    email : str
        Contact e-mail (non-empty, not validated further).

    Properties
    ----------
    document_id : str
        Kind-specific tax identifier (CPF or CNPJ).
    kind : ClientKind
        Variant tag, "individual" or "corporate".
    """
    name: str
    email: str

    kind: ClassVar[ClientKind]

    def __post_init__(self):
        check_not_blank("name", self.name)
        check_not_blank("email", self.email)

    @property
    @abstractmethod
    def document_id(self) -> str:
        """Kind-specific tax document identifier."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.name}', doc={self.document_id})"


@dataclass(frozen=True, eq=False, repr=False)
class IndividualClient(Client):
    """
    Natural person (pessoa física) identified by a CPF.

    Examples
    --------
    >>> IndividualClient("João Silva", "joao@email.com", cpf="123.456.789-00")
    IndividualClient('João Silva', doc=123.456.789-00)
    """
    cpf: str

    kind: ClassVar[ClientKind] = "individual"

    @property
    def document_id(self) -> str:
        return self.cpf


@dataclass(frozen=True, eq=False, repr=False)
class CorporateClient(Client):
    """
    Legal entity (pessoa jurídica) identified by a CNPJ.

    Examples
    --------
    >>> CorporateClient("Empresa XYZ", "contato@xyz.com", cnpj="12.345.678/0001-99")
    CorporateClient('Empresa XYZ', doc=12.345.678/0001-99)
    """
    cnpj: str

    kind: ClassVar[ClientKind] = "corporate"

    @property
    def document_id(self) -> str:
        return self.cnpj
