import os
import time
import logging
import typing as tp

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.timer import Timer
from textual.widgets import Footer, Header, Static

from .shared import SLOT_KEYS, QUIT_KEY, SAVE_KEY, ZERO_ALL_KEY, titled
from .settings import Settings
from .actions import Engine, Step
from .timer import frame
from .timer_row import TimerRow

log = logging.getLogger(__name__)

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding(QUIT_KEY, f"press_key('{QUIT_KEY}')", "Quit."),
        Binding(SAVE_KEY, f"press_key('{SAVE_KEY}')", "Save."),
        Binding(ZERO_ALL_KEY, f"press_key('{ZERO_ALL_KEY}')", "Zero All."),
        *[
            Binding(k, f"press_key('{k}')", f"Toggle {k}.", show=False)
            for k in SLOT_KEYS
        ],
    ]

    def __init__(
        self, 
        engine: Engine, 
        settings: Settings | None = None, 
        clock: tp.Callable[[], float] = time.time, 
    ) -> None:
        '''
        `clock` returns epoch seconds. Swap it out to drive the 
        timers from tests.  
        '''
        super().__init__()

        self.engine = engine
        self.settings = settings or Settings()
        self.wall_clock = clock

        self.title = "Timetracker"
        source_path = engine.timer_set.source_path
        if source_path is not None:
            self.sub_title = os.path.basename(source_path)

        self.timerRows = {
            timer.slot: TimerRow(key, id=f"timer-{timer.slot}")
            for timer, key in zip(engine.timer_set, SLOT_KEYS)
        }
        self.sStatus = Static("", id="status", markup=False)
        self.shown_status = ""
        self.redrawTimer: Timer | None = None
    
    def now(self) -> int:
        return int(self.wall_clock())

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with titled(Vertical(id="timers"), 'Timers', skip_bottom=False):
            yield from self.timerRows.values()
        yield self.sStatus
        yield Footer(compact=True)
    
    def on_mount(self) -> None:
        self.redraw()
        self.redrawTimer = self.set_interval(
            self.settings.poll_interval, self.redraw, 
        )
    
    def on_unmount(self) -> None:
        if self.redrawTimer is not None:
            self.redrawTimer.stop()
    
    def action_press_key(self, key: str) -> None:
        step = self.engine.pressKey(key, self.now())
        match step:
            case Step.QUIT:
                self.exit()
            case Step.REDRAW:
                self.redraw()
            case Step.IDLE:
                pass
    
    def redraw(self) -> None:
        for row in frame(self.engine.timer_set, self.now()):
            self.timerRows[row.slot].row = row
        status = self.engine.status or ""
        if status != self.shown_status:
            self.shown_status = status
            self.sStatus.update(status)
