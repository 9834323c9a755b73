"""Contention tests: many threads, one file."""

import threading

from inisettings import Settings, SettingsRegistry
from inisettings.ini import parse


def _run_all(threads):
    for t in threads:
        t.start()
    for t in threads:
        t.join()


def test_same_key_holds_one_written_value(tmp_path):
    settings = Settings(str(tmp_path / 'race.ini'))
    settings.set('race.key', 'initial')
    written = {'initial'} | {f'writer-{i}-{j}' for i in range(8) for j in range(20)}
    observed: list[str] = []
    observed_lock = threading.Lock()

    def writer(i):
        for j in range(20):
            settings.set('race.key', f'writer-{i}-{j}')

    def reader():
        for _ in range(40):
            value = settings.get('race.key', '')
            with observed_lock:
                observed.append(value)

    threads = [threading.Thread(target=writer, args=(i,)) for i in range(8)]
    threads += [threading.Thread(target=reader) for _ in range(4)]
    _run_all(threads)

    final = settings.get('race.key', '')
    assert final in written
    assert len(observed) == 4 * 40
    assert set(observed) <= written
    # the file agrees with memory.
    table = parse((tmp_path / 'race.ini').read_text())
    assert table['race.key'] == final


def test_distinct_keys_are_all_kept(tmp_path):
    settings = Settings(str(tmp_path / 'many.ini'))

    def writer(i):
        for j in range(10):
            settings.set(f'section{i}.key{j}', i * 100 + j)

    _run_all([threading.Thread(target=writer, args=(i,)) for i in range(6)])

    table = parse((tmp_path / 'many.ini').read_text())
    assert len(table) == 60
    for i in range(6):
        for j in range(10):
            assert settings.getint(f'section{i}.key{j}', -1) == i * 100 + j


def test_registry_shares_one_instance_across_threads(tmp_path):
    registry = SettingsRegistry()
    path = str(tmp_path / 'shared.ini')
    got: list[Settings] = []
    got_lock = threading.Lock()
    barrier = threading.Barrier(8)

    def fetch():
        barrier.wait()
        ins = registry.get_instance(path)
        ins.set('shared.counter', 1)
        with got_lock:
            got.append(ins)

    _run_all([threading.Thread(target=fetch) for _ in range(8)])

    assert len(got) == 8
    assert all(i is got[0] for i in got)
    assert len(registry) == 1
