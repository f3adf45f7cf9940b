from src.domain.entities import JobStatus, LeadStatus

LEAD_TRANSITIONS: dict[str, frozenset[str]] = {
    "new": frozenset({"negotiation", "won", "lost"}),
    "negotiation": frozenset({"won", "lost"}),
    "won": frozenset(),
    "lost": frozenset(),
}

JOB_TRANSITIONS: dict[str, frozenset[str]] = {
    "scheduled": frozenset({"accepted", "rejected", "cancelled"}),
    "accepted": frozenset({"in_progress", "cancelled"}),
    "in_progress": frozenset({"completed"}),
    "rejected": frozenset({"cancelled"}),
    "completed": frozenset(),
    "cancelled": frozenset(),
}


def can_transition_lead(current: LeadStatus, new: LeadStatus) -> bool:
    """
    Sales pipeline: new -> negotiation -> won | lost.
    Won and lost are terminal. Staying in place is always allowed.
    """
    if current == new:
        return True
    return new in LEAD_TRANSITIONS.get(current, frozenset())


def can_transition_job(current: JobStatus, new: JobStatus) -> bool:
    if current == new:
        return True
    return new in JOB_TRANSITIONS.get(current, frozenset())


def is_terminal_job_status(status: JobStatus) -> bool:
    return not JOB_TRANSITIONS.get(status)
