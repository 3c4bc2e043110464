"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
The working precision, rounding mode and output scales are constants and are
deliberately absent here.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FixedPointMathConfig(BaseSettings):
    """Fixed point math configuration"""
    
    model_config = SettingsConfigDict(
        env_prefix="FIXED_POINT_MATH_",
        env_file=".env",
        case_sensitive=False,
    )
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    
    # Flat cap on nth_root updates; None derives it from the degree and input
    max_root_iterations: Optional[int] = Field(default=None, ge=1)


# Global configuration instance
config = FixedPointMathConfig()


def get_config() -> FixedPointMathConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> FixedPointMathConfig:
    """Reload configuration from environment"""
    global config
    config = FixedPointMathConfig()
    return config
