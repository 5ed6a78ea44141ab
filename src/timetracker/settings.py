from __future__ import annotations

import os
import logging

import dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .shared import SLOT_KEYS

ENV_VARS = {
    'capacity':        'TIMETRACKER_CAPACITY',
    'max_name_length': 'TIMETRACKER_MAX_NAME_LENGTH',
    'poll_interval':   'TIMETRACKER_POLL_INTERVAL',
    'log_level':       'TIMETRACKER_LOG_LEVEL',
}

class Settings(BaseModel):
    capacity: int = Field(default=20, ge=1, le=len(SLOT_KEYS))
    max_name_length: int = Field(default=80, ge=1)
    poll_interval: float = Field(default=0.1, gt=0.0)  # seconds
    log_level: str = 'WARNING'

    model_config = ConfigDict(
        frozen=True,
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'Unknown log level: {v}')
        return level

    @classmethod
    def fromEnv(cls) -> Settings:
        '''
        Defaults, overridden by `TIMETRACKER_*` variables from the 
        environment or a `.env` file found from the working directory.  
        '''
        dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))
        overrides = {}
        for field, var in ENV_VARS.items():
            value = os.getenv(var)
            if value is not None:
                overrides[field] = value
        return cls.model_validate(overrides)
