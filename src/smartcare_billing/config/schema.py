"""Configuration schema models using pydantic.

This module defines the configuration structure and validation rules using pydantic.
All configuration values are validated according to the schema defined here.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class DisplayConfig(BaseModel):
    """Configuration for console output.
    
    Attributes:
        width: Width of title banners in characters
        currency_symbol: Symbol prefixed to money values
        clear_screen: Whether to clear the terminal between screens
    """
    
    width: int = Field(default=55, ge=20, le=200, description="Banner width")
    currency_symbol: str = Field(default="$", description="Currency symbol")
    clear_screen: bool = Field(default=True, description="Clear screen between menus")
    
    @field_validator("currency_symbol")
    @classmethod
    def validate_currency_symbol(cls, v: str) -> str:
        """Validate the currency symbol is short and non-empty.
        
        Raises:
            ValueError: If symbol is blank or longer than 3 characters
        """
        if not v.strip() or len(v) > 3:
            raise ValueError(
                f"Invalid currency_symbol: {v!r}. Must be 1 to 3 non-blank characters"
            )
        return v


class SessionConfig(BaseModel):
    """Configuration for the interactive billing session.
    
    Attributes:
        first_patient_id: Id assigned to the first admitted patient
        abort_on_invalid_input: End the session on malformed numeric input.
            When false the admission is cancelled and the main menu returns
    """
    
    first_patient_id: int = Field(
        default=5001,
        ge=1,
        description="First sequential patient id"
    )
    abort_on_invalid_input: bool = Field(
        default=True,
        description="Terminate the session on malformed numeric input"
    )


class LoggingConfig(BaseModel):
    """Configuration for logging.
    
    Attributes:
        level: Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        redact_pii: Whether to redact patient names from logs
    """
    
    level: str = Field(
        default="WARNING",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Path = Field(
        default=Path("logs/smartcare-billing.log"),
        description="Log file path"
    )
    redact_pii: bool = Field(
        default=False,
        description="Redact PII from logs"
    )
    
    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level.
        
        Args:
            v: Log level string
            
        Returns:
            Validated log level (uppercase)
            
        Raises:
            ValueError: If log level is not valid
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return v_upper


class Config(BaseModel):
    """Root configuration model.
    
    Attributes:
        display: Console output configuration
        session: Interactive session configuration
        logging: Logging configuration
        
    Example:
        >>> config = Config(session=SessionConfig(first_patient_id=9001))
        >>> config.session.first_patient_id
        9001
        >>> config.display.width
        55
    """
    
    display: DisplayConfig = DisplayConfig()
    session: SessionConfig = SessionConfig()
    logging: LoggingConfig = LoggingConfig()
