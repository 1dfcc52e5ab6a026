"""Progress display for long exports."""

from tqdm import tqdm


def build_progress_bar_export(total_messages: int) -> tqdm:
    """Create a progress bar counting exported messages, starting at zero."""
    return tqdm(
        total=total_messages,
        initial=0,
        ascii="->#",
        unit="msg",
        mininterval=0.1,
        dynamic_ncols=True,
    )