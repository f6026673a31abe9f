"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validator - used by framework via @field_validator decorator
_.parse_path_list  # noqa: F821  # unused method (textconvert/core/config.py)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (textconvert/core/config.py)

# Pydantic model_config class variables - read by framework at class definition time
model_config  # noqa: F821  # unused variable (textconvert/core/models.py)
model_config  # noqa: F821  # unused variable (textconvert/session/history.py)
