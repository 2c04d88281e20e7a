from . import pauli, reference
