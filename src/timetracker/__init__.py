from .UI import UI as TimetrackerUI
from .actions import Action, Engine, Step, keyToAction
from .config import loadFile, loads
from .persistent import dumps, writeFile
from .settings import Settings
from .timer import (
    Row, Timer, TimerSet, 
    frame, formatDuration, observe, toggle, turnOff, turnOn, zero, zeroAll, 
)

__all__ = [
    "TimetrackerUI", "Action", "Engine", "Step", "keyToAction", 
    "loadFile", "loads", "dumps", "writeFile", "Settings", 
    "Row", "Timer", "TimerSet", 
    "frame", "formatDuration", "observe", "toggle", "turnOff", "turnOn", 
    "zero", "zeroAll", 
]
