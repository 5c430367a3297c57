import logging
import os
import subprocess
import sys
import numpy as np
import pytest
from numpy import testing
import hvec
from hvec import backend, v4, v4h
from hvec.backend import npscalar


def test_load_backend():
    assert backend.load_backend('npscalar') is npscalar
    assert backend.load_backend('numba').__name__ == 'hvec.backend.numba'
    with pytest.raises(ValueError):
        backend.load_backend('cuda')


def test_set_backend(caplog):
    previous = backend.get_backend()
    nb = backend.load_backend('numba')
    try:
        with caplog.at_level(logging.INFO, logger='hvec.backend'):
            backend.set_backend(nb)
        assert backend.get_backend() is nb
        assert 'hvec.backend.numba' in caplog.text
        assert v4h.vec_equals(v4.add(v4h.make_point(1, 2, 3), v4h.xhat), v4h.make_point(2, 2, 3))
    finally:
        backend.set_backend(previous)


def test_configure_backend(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('HOME', str(tmp_path))
    previous = backend.get_backend()
    try:
        (tmp_path/'hvec.yml').write_text('backend: numba\n')
        module = backend.configure_backend()
        assert module.__name__ == 'hvec.backend.numba'
        assert backend.get_backend() is module

        (tmp_path/'hvec.yml').write_text('other: 1\n')
        assert backend.configure_backend() is npscalar

        (tmp_path/'hvec.yml').write_text('backend: cuda\n')
        with pytest.raises(ValueError):
            backend.configure_backend()
    finally:
        backend.set_backend(previous)


@pytest.mark.parametrize('text', ['numba\n', '- a\n- b\n', 'backend: cuda\n'])
def test_import_ignores_config(tmp_path, text):
    (tmp_path/'hvec.yml').write_text(text)
    root = os.path.dirname(os.path.dirname(os.path.abspath(hvec.__file__)))
    env = dict(os.environ, HOME=str(tmp_path), PYTHONPATH=root)
    code = 'import hvec; assert hvec.get_backend().__name__ == "hvec.backend.npscalar"'
    result = subprocess.run([sys.executable, '-c', code], cwd=str(tmp_path), env=env, capture_output=True, text=True)
    assert result.returncode == 0, result.stderr


def test_backends_agree():
    nb = backend.load_backend('numba')
    rng = np.random.default_rng(5)
    for _ in range(10):
        a, b = rng.uniform(-10, 10, (2, 4)).astype(np.float32)
        f = np.float32(rng.uniform(-3, 3))
        assert nb.equals(a, b) == npscalar.equals(a, b)
        assert nb.equals(a, a.copy()) and npscalar.equals(a, a.copy())
        testing.assert_allclose(nb.dot_sum(a, b), npscalar.dot_sum(a, b), rtol=1e-5)
        testing.assert_allclose(nb.length(a), npscalar.length(a), rtol=1e-6)
        for name, args in (('add', (a, b)), ('sub', (a, b)), ('scale', (a, f)), ('divide', (a, f)),
                           ('hadamard', (a, b)), ('normalize', (a,)), ('lerp', (a, b, f))):
            out_nb = np.zeros(4, np.float32)
            out_np = np.zeros(4, np.float32)
            getattr(nb, name)(out_nb, *args)
            getattr(npscalar, name)(out_np, *args)
            testing.assert_allclose(out_nb, out_np, rtol=1e-5, atol=1e-5, err_msg=name)


@pytest.mark.parametrize('name', backend.BACKEND_NAMES)
def test_inputs_not_written(name):
    module = backend.load_backend(name)
    a = np.array((1, 2, 3, 1), np.float32)
    b = np.array((4, -5, 6, 0), np.float32)
    a.flags.writeable = False
    b.flags.writeable = False
    out = np.zeros(4, np.float32)
    module.add(out, a, b)
    module.sub(out, a, b)
    module.scale(out, a, np.float32(2))
    module.divide(out, a, np.float32(0))
    module.hadamard(out, a, b)
    module.normalize(out, b)
    module.lerp(out, a, b, np.float32(0.25))
    testing.assert_array_equal(out, [1.75, 0.25, 3.75, 0.75])
