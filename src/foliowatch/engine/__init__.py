"""Progress reconciliation engine."""

from foliowatch.engine.reconciler import DisplayListener, ProgressReconciler, ReconcilerState
from foliowatch.engine.timers import AsyncioTimerScheduler, ReconcilerTimers, TimerHandle, TimerScheduler

__all__ = [
    "AsyncioTimerScheduler",
    "DisplayListener",
    "ProgressReconciler",
    "ReconcilerState",
    "ReconcilerTimers",
    "TimerHandle",
    "TimerScheduler",
]
