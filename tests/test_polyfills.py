"""
Tests for the console and animation-frame polyfills
"""

import logging
from types import SimpleNamespace

import pytest

from breve.polyfills import CONSOLE_METHODS, FrameScheduler, LoggingConsole, stub_console


class TestStubConsole:

    def test_creates_noop_console(self):
        console = stub_console()

        for name in CONSOLE_METHODS:
            assert getattr(console, name)('anything', key='value') is None

    def test_fills_only_missing_methods(self):
        calls = []
        console = SimpleNamespace(log=calls.append, warn='not callable')

        assert stub_console(console) is console
        console.log('kept')
        console.warn('replaced')
        console.debug('stubbed')

        assert calls == ['kept']
        assert callable(console.warn)

    def test_complete_console_untouched(self):
        console = LoggingConsole()
        methods = {name: getattr(type(console), name) for name in CONSOLE_METHODS}

        stub_console(console)

        assert all(name not in vars(console) for name in methods)


class TestLoggingConsole:

    def test_levels(self, caplog):
        console = LoggingConsole()

        with caplog.at_level(logging.DEBUG, logger='breve.console'):
            console.log('log', 1)
            console.info('info')
            console.warn('warn')
            console.error('error')
            console.debug('debug')

        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.INFO, 'log 1'),
            (logging.INFO, 'info'),
            (logging.WARNING, 'warn'),
            (logging.ERROR, 'error'),
            (logging.DEBUG, 'debug'),
        ]

    def test_assert_logs_only_on_failure(self, caplog):
        console = LoggingConsole()

        with caplog.at_level(logging.DEBUG, logger='breve.console'):
            console.assert_(True, 'fine')
            console.assert_(0, 'value was', 0)
            console.assert_(False)

        assert [r.getMessage() for r in caplog.records] == [
            'Assertion failed: value was 0',
            'Assertion failed',
        ]

    def test_custom_logger(self, caplog):
        console = LoggingConsole(logging.getLogger('app.ui'))

        with caplog.at_level(logging.INFO, logger='app.ui'):
            console.log('hello')

        assert caplog.records[0].name == 'app.ui'


class TestFrameScheduler:

    def test_fallback_uses_scheduler(self, scheduler):
        frames = FrameScheduler(scheduler)
        calls = []

        handle = frames.request(lambda: calls.append('frame'))

        assert handle.due == pytest.approx(1000 / 60)
        scheduler.advance(16)
        assert calls == []
        scheduler.advance(1)
        assert calls == ['frame']

    def test_fallback_cancel(self, scheduler):
        frames = FrameScheduler(scheduler)
        calls = []

        handle = frames.request(lambda: calls.append('frame'))
        frames.cancel(handle)
        scheduler.advance(100)

        assert calls == []

    def test_frame_rate(self, scheduler):
        frames = FrameScheduler(scheduler, frame_rate=30)

        assert frames.frame_interval_ms == pytest.approx(1000 / 30)
        assert frames.request(lambda: None).due == pytest.approx(1000 / 30)

    def test_native_functions_preferred(self, scheduler):
        requested = []
        cancelled = []
        frames = FrameScheduler(
            scheduler,
            request=lambda callback: requested.append(callback) or 7,
            cancel=cancelled.append
        )

        callback = lambda: None
        assert frames.request(callback) == 7
        frames.cancel(7)

        assert requested == [callback]
        assert cancelled == [7]
        assert scheduler.pending == []

    @pytest.mark.parametrize('frame_rate', [0, -60])
    def test_invalid_frame_rate(self, scheduler, frame_rate):
        with pytest.raises(ValueError):
            FrameScheduler(scheduler, frame_rate=frame_rate)


def test_frame_scheduler_from_config(scheduler):
    from breve.config import BreveConfig

    frames = FrameScheduler.from_config(BreveConfig(frame_rate=25), scheduler)

    assert frames.scheduler is scheduler
    assert frames.request(lambda: None).due == pytest.approx(40)
