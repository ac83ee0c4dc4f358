"""Statistical calculation modules."""

from . import quantiles as quantiles
from . import sample_size as sample_size
