'''
A timer is banked time while stopped and a finish instant while running.  
`running` selects which of `remaining_seconds` / `finish_time` is 
meaningful; the other one is kept at zero.  

Every operation takes the current instant `now` (whole epoch seconds) 
from the caller, so nothing here reads the clock.  
'''

from __future__ import annotations

import typing as tp

from pydantic import BaseModel, Field, field_validator

from .errors import ConfigCapacityExceeded

class Timer(BaseModel):
    name: str
    slot: int = Field(ge=1)   # 1-based
    running: bool = False
    remaining_seconds: int = Field(default=0, ge=0)
    finish_time: int = 0

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v:
            raise ValueError('Timer name must not be empty')
        if '=' in v:
            raise ValueError(f'Timer name must not contain "=": {v!r}')
        if '\n' in v or '\r' in v:
            raise ValueError(f'Timer name must be a single line: {v!r}')
        return v

class Row(tp.NamedTuple):
    slot: int
    minutes: int
    seconds: int
    name: str
    running: bool

def turnOn(timer: Timer, now: int) -> None:
    if timer.running:
        return
    timer.finish_time = now + timer.remaining_seconds
    timer.running = True
    timer.remaining_seconds = 0

def turnOff(timer: Timer, now: int) -> None:
    if not timer.running:
        return
    timer.remaining_seconds = max(0, timer.finish_time - now)
    timer.running = False
    timer.finish_time = 0

def toggle(timer: Timer, now: int) -> None:
    if timer.running:
        turnOff(timer, now)
    else:
        turnOn(timer, now)

def observe(timer: Timer, now: int) -> int:
    '''
    Seconds left on `timer` at `now`.  
    A running timer found past its finish is stopped at zero here.  
    '''
    if not timer.running:
        return timer.remaining_seconds
    if timer.finish_time < now:
        turnOff(timer, now)
        return 0
    return timer.finish_time - now

def zero(timer: Timer, now: int) -> None:
    turnOff(timer, now)
    timer.remaining_seconds = 0

def zeroAll(timers: tp.Iterable[Timer], now: int) -> None:
    for timer in timers:
        zero(timer, now)

def formatDuration(seconds: int) -> str:
    minutes, seconds = divmod(max(0, seconds), 60)
    return f'{minutes}:{seconds:02d}'

def frame(timers: tp.Iterable[Timer], now: int) -> list[Row]:
    rows = []
    for timer in timers:
        minutes, seconds = divmod(observe(timer, now), 60)
        rows.append(Row(
            slot=timer.slot,
            minutes=minutes,
            seconds=seconds,
            name=timer.name,
            running=timer.running,
        ))
    return rows

class TimerSet:
    '''
    Ordered, fixed-capacity collection of timers.  
    Filled once at load time; afterwards only the timers themselves change.  
    '''
    def __init__(
        self, /, capacity: int, source_path: str | None = None, 
    ) -> None:
        self.capacity = capacity
        self.source_path = source_path
        self.__timers: list[Timer] = []
    
    def add(self, name: str, remaining_seconds: int) -> Timer:
        if len(self.__timers) >= self.capacity:
            raise ConfigCapacityExceeded(len(self.__timers) + 1, self.capacity)
        timer = Timer(
            name=name,
            slot=len(self.__timers) + 1,
            remaining_seconds=remaining_seconds,
        )
        self.__timers.append(timer)
        return timer
    
    def bySlot(self, slot: int) -> Timer | None:
        if 1 <= slot <= len(self.__timers):
            return self.__timers[slot - 1]
        return None
    
    def names(self) -> list[str]:
        return [t.name for t in self.__timers]

    def __len__(self) -> int:
        return len(self.__timers)
    
    def __iter__(self) -> tp.Iterator[Timer]:
        return iter(self.__timers)
    
    def __getitem__(self, index: int) -> Timer:
        return self.__timers[index]
