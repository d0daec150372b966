"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
from . import casing
from . import charsets
from . import editing
from . import digest
from . import operators
from . import fields
from . import serialization
from . import frames

from .casing import CaseVariant, Ordinal, LocaleAware, fold
from .charsets import CharacterSet
from .operators import Operator, OperatorKind
from .fields import *
from .serialization import DecodeError, TransformRecord

__all__ = [
    'casing',
    'charsets',
    'editing',
    'digest',
    'operators',
    'fields',
    'serialization',
    'frames',
    'CaseVariant',
    'Ordinal',
    'LocaleAware',
    'fold',
    'CharacterSet',
    'Operator',
    'OperatorKind',
    'DecodeError',
    'TransformRecord',
    *fields.__all__
]
