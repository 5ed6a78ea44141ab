from __future__ import annotations

import time
import logging
from enum import Enum
from dataclasses import dataclass
from abc import ABC, abstractmethod

from .errors import PersistenceWriteError
from .shared import SLOT_KEYS, QUIT_KEY, SAVE_KEY, ZERO_ALL_KEY
from .timer import TimerSet, toggle, zeroAll
from .persistent import writeFile

log = logging.getLogger(__name__)

class Action:
    class Base(ABC):
        @abstractmethod
        def describe(self) -> str:
            raise NotImplementedError()
    
    @dataclass(frozen=True)
    class ToggleSlot(Base):
        slot: int   # 1-based

        def describe(self) -> str:
            return f'toggle slot {self.slot}'
    
    @dataclass(frozen=True)
    class Quit(Base):
        def describe(self) -> str:
            return 'quit'
    
    @dataclass(frozen=True)
    class Save(Base):
        def describe(self) -> str:
            return 'save'
    
    @dataclass(frozen=True)
    class ZeroAll(Base):
        def describe(self) -> str:
            return 'zero all'

class Step(Enum):
    IDLE = 'idle'
    REDRAW = 'redraw'
    QUIT = 'quit'

COMMANDS: dict[str, Action.Base] = {
    QUIT_KEY: Action.Quit(),
    SAVE_KEY: Action.Save(),
    ZERO_ALL_KEY: Action.ZeroAll(),
}

def keyToAction(key: str, n_timers: int) -> Action.Base | None:
    '''
    `None` for keys bound to nothing, including slot keys 
    past the last loaded timer.  
    '''
    if key in COMMANDS:
        return COMMANDS[key]
    if len(key) != 1:
        return None
    slot = SLOT_KEYS.find(key) + 1
    if 1 <= slot <= n_timers:
        return Action.ToggleSlot(slot)
    return None

class Engine:
    def __init__(self, timer_set: TimerSet) -> None:
        self.timer_set = timer_set
        self.status: str | None = None
    
    def dispatch(self, action: Action.Base | None, now: int) -> Step:
        if action is None:
            return Step.IDLE
        log.debug(f'Dispatching {action.describe()} at {now}')
        match action:
            case Action.ToggleSlot(slot=slot):
                timer = self.timer_set.bySlot(slot)
                if timer is None:
                    return Step.IDLE
                toggle(timer, now)
                self.status = None
            case Action.Quit():
                return Step.QUIT
            case Action.Save():
                self.save(now)
            case Action.ZeroAll():
                zeroAll(self.timer_set, now)
                self.status = None
            case _:
                raise ValueError(f'Unknown action: {action}')
        return Step.REDRAW
    
    def pressKey(self, key: str, now: int) -> Step:
        return self.dispatch(keyToAction(key, len(self.timer_set)), now)
    
    def save(self, now: int) -> None:
        path = self.timer_set.source_path
        if path is None:
            self.status = 'Nowhere to save.'
            return
        try:
            writeFile(self.timer_set, path, now)
        except PersistenceWriteError as e:
            self.status = str(e)
            return
        self.status = f'Saved at {time.strftime("%H:%M", time.localtime(now))}'
