"""Reference numeric kernels in plain Python: softmax variants, element-wise addition and block reduction."""

__version__ = "0.1.0"
__all__ = ["softmax", "arrays"]