'''
Timer files look like  
```
# comment
Reading=25M
Email=10M
```
One timer per line; line order is slot order.  
'''

import re
import logging

from .errors import (
    ConfigError, ConfigNotFound, ConfigParseError, ConfigEmpty, 
    ConfigCapacityExceeded, 
)
from .settings import Settings
from .timer import TimerSet

log = logging.getLogger(__name__)

LINE_PATTERN = re.compile(r'([^=\r]+)=([0-9]{1,9})M')

def parseLine(
    line: str, line_no: int, max_name_length: int, 
) -> tuple[str, int] | None:
    '''
    Returns `(name, minutes)`, or `None` for comments and blank lines.  
    '''
    if line.startswith('#') or not line.strip():
        return None
    match = LINE_PATTERN.fullmatch(line)
    if match is None:
        raise ConfigParseError(line_no, line)
    name, minutes = match.group(1), int(match.group(2))
    if len(name) > max_name_length:
        raise ConfigParseError(
            line_no, line, 
            f'name longer than {max_name_length} characters', 
        )
    return name, minutes

def loads(
    text: str, settings: Settings | None = None, 
    source_path: str | None = None, 
) -> TimerSet:
    if settings is None:
        settings = Settings()
    entries: list[tuple[str, int]] = []
    seen: set[str] = set()
    for line_no, line in enumerate(text.split('\n'), start=1):
        line = line.removesuffix('\r')
        parsed = parseLine(line, line_no, settings.max_name_length)
        if parsed is None:
            continue
        name, minutes = parsed
        if name in seen:
            raise ConfigParseError(line_no, line, f'duplicate name "{name}"')
        seen.add(name)
        entries.append(parsed)
    if not entries:
        raise ConfigEmpty()
    if len(entries) > settings.capacity:
        raise ConfigCapacityExceeded(len(entries), settings.capacity)
    timer_set = TimerSet(capacity=settings.capacity, source_path=source_path)
    for name, minutes in entries:
        timer_set.add(name, minutes * 60)
    return timer_set

def loadFile(path: str, settings: Settings | None = None) -> TimerSet:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except FileNotFoundError:
        raise ConfigNotFound(path)
    except UnicodeDecodeError:
        raise ConfigError(f'{path} is not valid UTF-8')
    except OSError as e:
        raise ConfigNotFound(path, e.strerror or str(e))
    timer_set = loads(text, settings, source_path=path)
    log.info(f'Loaded {len(timer_set)} timers from {path}')
    return timer_set
