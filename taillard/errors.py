"""Exception types raised by the Taillard instance generator."""


class TaillardError(Exception):
    """Base class for all generator errors."""


class OutOfRangeIdError(TaillardError, IndexError):
    """Instance id does not name one of the 120 Taillard instances."""

    def __init__(self, instance_id: int, first: int = 1, last: int = 120):
        self.instance_id = instance_id
        super().__init__(f"instance id {instance_id} out of range [{first}, {last}]")


class InstanceNameError(TaillardError, ValueError):
    """Instance name is not of the form 'ta<number>'."""


class InvalidSeedError(TaillardError, ValueError):
    """Seed cannot drive the generator (0 and the modulus are fixed points)."""


class ConfigError(TaillardError, ValueError):
    """Generator configuration is malformed."""
