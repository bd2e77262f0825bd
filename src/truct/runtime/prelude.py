# Bootstrap payload executed inside the build-script namespace before the
# build script itself. The host injects ``__natives__`` (the registration
# table) and ``__truct_version__``; this file publishes them as ``truct``.
from types import SimpleNamespace as _Namespace

truct = _Namespace(version=__truct_version__, **__natives__)

del _Namespace, __natives__, __truct_version__
