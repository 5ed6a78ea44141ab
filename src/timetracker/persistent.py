'''
Saves timers in the same `<name>=<N>M` shape they are loaded from.  
Only whole minutes survive a save; the sub-minute remainder is dropped, 
and so are any comments in the original file.  
'''

import logging

from .errors import PersistenceWriteError
from .timer import TimerSet, observe

log = logging.getLogger(__name__)

def dumps(timer_set: TimerSet, now: int) -> str:
    '''
    A running timer is written as its remaining time at `now`, 
    and keeps running.  
    '''
    return ''.join(
        f'{timer.name}={observe(timer, now) // 60}M\n'
        for timer in timer_set
    )

def writeFile(timer_set: TimerSet, path: str, now: int) -> None:
    text = dumps(timer_set, now)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
    except OSError as e:
        log.error(f'Saving to {path} failed: {e}')
        raise PersistenceWriteError(path, e.strerror or str(e)) from e
    log.info(f'Saved {len(timer_set)} timers to {path}')
