from .codec import encode, decode, IsinError, InvalidFormat, OutOfRange, ISIN_LENGTH, MAX_ISIN_VALUE
from . import base36

__all__ = ['encode', 'decode', 'IsinError', 'InvalidFormat', 'OutOfRange', 'ISIN_LENGTH',
           'MAX_ISIN_VALUE', 'base36']
