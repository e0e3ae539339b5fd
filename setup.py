# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import os

from setuptools import setup

ENVIRON_TRUE = frozenset({"1", "true", "yes"})

modules = [\
    "authenticator",
    "base32",
    "bitbuf",
    "consts",
    "fbn",
    "fbnotation",
    "llog",
    "mutil",
    "profiles"\
]

# Hot paths that may be compiled; the .py modules remain the reference.
cython_modules = [\
    "bitbuf",
    "fbnotation",
    "mutil"\
]

def ext_modules():
    if os.environ.get("FBN_CYTHON", "").lower() not in ENVIRON_TRUE:
        return []

    from Cython.Build import cythonize

    return cythonize([x + ".py" for x in cython_modules])

setup(
    name = "fbnotation",
    version = "1.0.0",
    description = "Fixed bit notation binary to text codec (base16/32/64 and"\
        " custom alphabets) with authenticator passcode helpers.",
    license = "GPLv2",
    python_requires = ">=3.6",
    py_modules = modules,
    data_files = [(os.path.join("etc", "fbn"), ["logging.ini"])],
    ext_modules = ext_modules(),
    extras_require = {
        "cython": ["Cython"],
        "test": ["pytest"],
    },
    entry_points = {
        "console_scripts": ["fbn = fbn:main"],
    },
)
