"""
Tests for the engine profiler.
"""
import pytest

from hydra_engine import HydraEngine, balanced_hydra
from hydra_engine.profiling import profile_block, profiler


@pytest.fixture
def enabled_profiler():
    profiler.reset()
    profiler.enable(report_at_exit=False)
    yield profiler
    profiler.disable()
    profiler.reset()


def test_records_engine_hot_spots(enabled_profiler):
    engine = HydraEngine()
    engine.load(balanced_hydra(2, 2))
    engine.cut(engine.leaves()[0])

    names = dict(enabled_profiler.summary())
    assert names['HydraEngine.cut'].calls == 1
    assert names['clone_subtree'].calls == 1
    assert names['TreeLayout.compute'].calls == 2


def test_block_and_print(enabled_profiler, capsys):
    with profile_block('custom'):
        pass
    enabled_profiler.print_stats()
    assert 'custom' in capsys.readouterr().out


def test_disabled_records_nothing():
    profiler.reset()
    engine = HydraEngine()
    engine.load(balanced_hydra(1, 2))
    engine.cut(engine.leaves()[0])
    assert profiler.summary() == []
