"""Base Pydantic model with strict defaults for layerconf models.

All layerconf models inherit from this base to ensure consistent
validation behavior across field descriptors, schemas and resolver options.
"""

from pydantic import BaseModel, ConfigDict


class LayerconfBaseModel(BaseModel):
    """Base model for all layerconf schemas.
    
    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Keeps enum members (kinds and read modes are compared by identity)
    """
    
    model_config = ConfigDict(
        extra='forbid',           # Reject unknown fields
        validate_assignment=True, # Validate on field mutation
        use_enum_values=False,    # Keep enum members, not their values
    )
