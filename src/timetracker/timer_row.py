from rich.text import Text
from textual.reactive import reactive
from textual.app import RenderResult
from textual.widget import Widget

from .timer import Row, formatDuration

class TimerRow(Widget):
    row: reactive[Row | None] = reactive(None)

    def __init__(self, slot_key: str, *args, **kw) -> None:
        '''
        `slot_key` is the key that toggles this row's timer.  
        '''
        super().__init__(*args, **kw)

        self.slot_key = slot_key
    
    def watch_row(self, _, new_row: Row | None) -> None:
        self.set_class(new_row is not None and new_row.running, 'running')

    def render(self) -> RenderResult:
        if self.row is None:
            return ''
        duration = formatDuration(self.row.minutes * 60 + self.row.seconds)
        # Text, not markup: names may contain brackets.
        return Text(f'[{self.slot_key}] {duration:>6}       {self.row.name}')
