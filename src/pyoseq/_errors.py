from __future__ import annotations


class SequenceExhaustedError(RuntimeError): ...


class EmptyCycleError(ValueError): ...


class ShortSequenceError(RuntimeError): ...
