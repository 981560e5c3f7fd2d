"""
GPU backend for simple linear regression using PyTorch.

Same two-pass algorithm as the CPU reference, run where the data already
lives. Supports CUDA (float64 by default) and MPS (float32 only).
"""

from typing import Any

from pylinreg.core.result import Result
from pylinreg.core.compute.timing import Timer
from pylinreg.regression._common import fit_warnings
from pylinreg.regression.design import LineDesign
from pylinreg.regression.solution import LineParams

REDUCED_PRECISION = "computed in float32 on {0}; expect ~1e-4 relative agreement with CPU"


class GPUTwoPassBackend:
    """
    GPU backend using the two-pass mean/covariance method.

    Two-pass centring is what keeps float32 usable here; a one-pass
    sum-of-products on the GPU would lose most significant digits.
    """

    def __init__(self, use_fp64: bool = True, device: str = 'cuda'):
        """
        Args:
            use_fp64: Compute in float64 (CUDA only). MPS has no float64.
            device: 'cuda', 'cuda:N' or 'mps'

        Raises:
            RuntimeError: If the device is unavailable, or float64 is
                requested on MPS
            ValueError: If the device string is not recognised
        """
        import torch

        if device.startswith('cuda'):
            if not torch.cuda.is_available():
                raise RuntimeError(
                    "CUDA not available. Install PyTorch with CUDA support, "
                    "or use backend='cpu'."
                )
            self.device = torch.device(device)
            self.use_fp64 = use_fp64

        elif device == 'mps':
            if not (hasattr(torch.backends, 'mps') and torch.backends.mps.is_available()):
                raise RuntimeError(
                    "MPS not available. Requires macOS with Apple Silicon "
                    "and PyTorch with MPS support."
                )
            if use_fp64:
                raise RuntimeError(
                    "MPS does not support float64. Use use_fp64=False "
                    "or use backend='cpu' for double precision."
                )
            self.device = torch.device('mps')
            self.use_fp64 = False

        else:
            raise ValueError(
                f"Unknown GPU device: {device!r}. Use 'cuda' or 'mps'."
            )

        self.dtype = torch.float64 if self.use_fp64 else torch.float32

    @property
    def name(self) -> str:
        precision = "fp64" if self.use_fp64 else "fp32"
        return f'gpu_two_pass_{precision}'

    def solve(self, design: LineDesign) -> Result[LineParams]:
        import torch

        timer = Timer(sync_cuda=self.device.type == 'cuda')
        timer.start()

        n = design.n

        with timer.section('data_transfer_to_gpu'):
            x = torch.from_numpy(design.x).to(device=self.device, dtype=self.dtype)
            y = torch.from_numpy(design.y).to(device=self.device, dtype=self.dtype)

        with timer.section('means'):
            mx = x.sum() / n
            my = y.sum() / n

        with timer.section('moments'):
            dx = x - mx
            ss_xy = torch.dot(dx, y - my)
            ss_xx = torch.dot(dx, dx)

        # torch division follows IEEE 754: no exception on a zero divisor
        with timer.section('coefficients'):
            slope = ss_xy / ss_xx
            intercept = my - slope * mx

        with timer.section('data_transfer_to_cpu'):
            params = LineParams(
                intercept=float(intercept.item()),
                slope=float(slope.item()),
                mean_x=float(mx.item()),
                mean_y=float(my.item()),
                ss_xy=float(ss_xy.item()),
                ss_xx=float(ss_xx.item()),
            )

        timer.stop()

        warnings_list = list(fit_warnings(design, params.ss_xx))
        if not self.use_fp64:
            warnings_list.append(REDUCED_PRECISION.format(self.device.type))

        info: dict[str, Any] = {
            'method': 'two_pass',
            'n': n,
            'device': str(self.device),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
