from chatexport.progress import build_progress_bar_export


def test_starts_at_zero_with_total():
    bar = build_progress_bar_export(250)
    try:
        assert bar.total == 250
        assert bar.n == 0
    finally:
        bar.close()


def test_position_advances():
    bar = build_progress_bar_export(10)
    try:
        bar.update(4)
        bar.update(3)
        assert bar.n == 7
        assert bar.n <= bar.total
    finally:
        bar.close()