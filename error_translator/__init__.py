"""Quipay Error Translator — turns any failure signal into one user-facing record.

Package layout:
    error_translator/
    ├── domain/        # Enums, errors, tagged failure signals
    ├── models/        # Pydantic schemas, the ordered error catalog
    ├── services/      # The translator (precedence chain)
    ├── controllers/   # Settings-aware orchestration for the HTTP layer
    └── views/         # Flask routes (HTTP layer)
"""

__version__ = "1.0.0"
