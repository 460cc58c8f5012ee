"""Exceptions raised while reconciling and repairing locales."""


class LocaleRepairError(Exception):
    """Base class for fatal locale repair failures."""


class PreconditionError(LocaleRepairError):
    """A required system facility is absent."""


class PrivilegeError(LocaleRepairError):
    """A remedial action needs elevation that is not available."""


class RemedialActionError(LocaleRepairError):
    """A remedial action ran but did not leave the system repaired."""
