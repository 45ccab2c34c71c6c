from absl import flags


def pytest_configure(config) -> None:
    # absl flags are normally parsed by app.run/absltest.main.
    if not flags.FLAGS.is_parsed():
        flags.FLAGS.mark_as_parsed()
