"""
Excepciones del núcleo de la intersección.

Las de validación (ValidationError y subclases) son recuperables: rechazan
una sola entrada y no modifican el estado. EmptyQueueError indica un fallo
de lógica en los despachadores.
"""


class ValidationError(ValueError):
    """Entrada rechazada al admitir un vehículo."""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value


class InvalidIdError(ValidationError):
    """El ID no es un entero de 3 dígitos."""


class InvalidPriorityError(ValidationError):
    """La prioridad no es 0 (regular) ni 1 (emergencia)."""


class InvalidDirectionError(ValidationError):
    """La dirección no es N, E, S ni W."""


class DuplicateIdError(ValidationError):
    """Ya hay un vehículo con ese ID en algún carril."""


class EmptyQueueError(RuntimeError):
    """Se intentó desencolar de un carril vacío."""
