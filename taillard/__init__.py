"""Generator of the Taillard flow shop benchmark instances.

Exports the instance generator, the random stream and the data container.
"""

from taillard.errors import (  # noqa: F401
    ConfigError,
    InstanceNameError,
    InvalidSeedError,
    OutOfRangeIdError,
    TaillardError,
)
from taillard.generator import (  # noqa: F401
    build_instance,
    generate_instance,
    generate_matrix,
    generate_processing_times,
    get_job_count,
    get_machine_count,
    iter_instance_ids,
)
from taillard.lcg import UnifGenerator, unif  # noqa: F401
from taillard.models import TaillardInstance  # noqa: F401
from taillard.seeds import (  # noqa: F401
    TIME_SEEDS,
    get_time_seed,
    instance_name,
    parse_instance_name,
)

__all__ = [
    "ConfigError",
    "InstanceNameError",
    "InvalidSeedError",
    "OutOfRangeIdError",
    "TaillardError",
    "TIME_SEEDS",
    "TaillardInstance",
    "UnifGenerator",
    "build_instance",
    "generate_instance",
    "generate_matrix",
    "generate_processing_times",
    "get_job_count",
    "get_machine_count",
    "get_time_seed",
    "instance_name",
    "iter_instance_ids",
    "parse_instance_name",
    "unif",
]
