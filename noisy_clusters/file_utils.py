import os
import shutil
import tempfile
from contextlib import contextmanager


def _default_mode() -> int:
    # os.umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


@contextmanager
def atomic_output(filepath: str):
    """
    Yield a temporary path next to `filepath`; move it into place on
    success, remove it on failure.

    The temporary name keeps the destination suffix so writers that infer
    the format from the extension (matplotlib) still work. The final file
    gets the mode of the file it replaces, or the umask default for a new
    one.
    """
    directory = os.path.dirname(os.path.abspath(filepath))
    suffix = os.path.splitext(filepath)[1]
    fd, tmp_path = tempfile.mkstemp(prefix=".tmp-", suffix=suffix, dir=directory)
    os.close(fd)
    try:
        yield tmp_path
        if os.path.exists(filepath):
            shutil.copymode(filepath, tmp_path)
        else:
            os.chmod(tmp_path, _default_mode())
        os.replace(tmp_path, filepath)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
