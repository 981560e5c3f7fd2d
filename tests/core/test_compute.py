"""
Tests for core.compute: device selection, Timer, tolerance tiers.
"""

import pytest

from pylinreg.core.compute import (
    Timer,
    get_cpu_info,
    select_device,
    select_tolerance,
)
from pylinreg.core.compute.tolerances import CPU_FP64, GPU_FP32, GPU_FP64


class TestDevice:

    def test_cpu_info(self):
        info = get_cpu_info()
        assert info.device_type == 'cpu'
        assert not info.is_gpu
        assert info.supports_fp64
        assert str(info).startswith("CPU")

    def test_select_cpu(self):
        assert select_device('cpu').device_type == 'cpu'

    def test_select_auto_always_succeeds(self):
        assert select_device('auto').device_type in ('cpu', 'cuda', 'mps')


class TestTimer:

    def test_sections_recorded(self):
        timer = Timer()
        timer.start()
        with timer.section('means'):
            sum(range(100))
        timer.stop()
        result = timer.result()
        assert result['total_seconds'] >= 0.0
        assert 'means' in result

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section('loop'):
                pass
        timer.stop()
        assert list(timer.result()) == ['total_seconds', 'loop']

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


class TestTolerances:

    @pytest.mark.parametrize("name, expected", [
        ('cpu_two_pass', CPU_FP64),
        ('gpu_two_pass_fp64', GPU_FP64),
        ('gpu_two_pass_fp32', GPU_FP32),
    ])
    def test_select(self, name, expected):
        assert select_tolerance(name) is expected

    def test_fp32_looser_than_fp64(self):
        assert GPU_FP32.rtol > GPU_FP64.rtol
