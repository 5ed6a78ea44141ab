class TimetrackerError(Exception):
    pass

class ConfigError(TimetrackerError):
    pass

class ConfigNotFound(ConfigError):
    def __init__(self, path: str, reason: str = 'no such file') -> None:
        super().__init__(f'failed to open {path}: {reason}')
        self.path = path
        self.reason = reason

class ConfigParseError(ConfigError):
    def __init__(
        self, line: int, content: str, reason: str = 'expected <name>=<N>M', 
    ) -> None:
        '''
        `line` is 1-based. `content` is the raw line, newline trimmed.  
        '''
        super().__init__(f'failed to parse line {line} ({content}): {reason}')
        self.line = line
        self.content = content
        self.reason = reason

class ConfigEmpty(ConfigError):
    def __init__(self) -> None:
        super().__init__('no timers defined')

class ConfigCapacityExceeded(ConfigError):
    def __init__(self, count: int, capacity: int) -> None:
        super().__init__(
            f'{count} timers defined, but at most {capacity} are supported', 
        )
        self.count = count
        self.capacity = capacity

class PersistenceWriteError(TimetrackerError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f'failed to save {path}: {reason}')
        self.path = path
        self.reason = reason

class DisplayInitError(TimetrackerError):
    pass
