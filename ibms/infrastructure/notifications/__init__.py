from .toast_notifier import Toast, ToastNotifier

__all__ = ["Toast", "ToastNotifier"]
