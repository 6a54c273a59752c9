from batch_shot.config import get_config


def verbose_callback(value: bool) -> None:
    """Echo the browser's own console output while capturing."""
    if value:
        get_config().verbose = True
