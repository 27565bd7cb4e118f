# python setup.py build_ext -i clean
import os

from setuptools import Extension, setup

PURE_PYTHON_ENV = "BINARY_HEAP_PURE_PYTHON"

COMPILER_DIRECTIVES = {
    "language_level": 3,
    "boundscheck": False,
    "wraparound": False,
    "initializedcheck": False,
    "nonecheck": False,
    "cdivision": True,
    "profile": False,
    # elements are arbitrary python objects; keep `int` hints as plain hints
    "annotation_typing": False,
}

NUMPY_C_API = [
    ("NPY_NO_DEPRECATED_API", "NPY_1_9_API_VERSION")
]

py_files = [
    ("src.binary_heap.binary_heap", "src/binary_heap/binary_heap.py"),
    ("src.binary_heap.topk", "src/binary_heap/topk.py"),
    ("src.binary_heap.util", "src/binary_heap/util.py"),
]

PACKAGES = ["src", "src.binary_heap"]


def use_cython() -> bool:
    """Compile the modules unless BINARY_HEAP_PURE_PYTHON=1 is set."""
    return os.getenv(PURE_PYTHON_ENV, "0") != "1"


def create_extensions(py_files: list[tuple]) -> list[Extension]:
    """
    Create Cython extension for all available module files.

    Parameters
    ----------
    py_files : list[tuple]
        A list of tuples. The first element of the tuple is the module in
        `Package.module` format. The second element is the `path` to the file.

    Returns
    -------
    list[Extension]
        A list of Cython extensions
    """
    import numpy as np

    extensions = []
    for module_name, py_path in py_files:
        extra_compile_args = [
            f"-D{name}={value}"
            for name, value in NUMPY_C_API
        ]
        if os.name != "nt":
            extra_compile_args.append("-O3")

        extension = Extension(
            name=module_name,
            sources=[py_path],
            include_dirs=[np.get_include()],
            extra_compile_args=extra_compile_args,
            language="c"
        )
        extensions.append(extension)
    return extensions


def main() -> None:
    """Main setup function for compiling"""
    files = [
        (name, path)
        for name, path in py_files
        if os.path.exists(path)
    ]

    if not files:
        raise RuntimeError("No module files found to compile")

    ext_modules = []
    if use_cython():
        from Cython.Build import cythonize

        ext_modules = cythonize(
            create_extensions(files),
            compiler_directives=COMPILER_DIRECTIVES,
            language_level=3
        )

    setup(
        name="binary-heap",
        version="0.1.0",
        description="Binary heap priority queue with non-destructive top-k",
        packages=PACKAGES,
        ext_modules=ext_modules,
        extras_require={"test": ["pytest", "numpy"]},
        python_requires=">=3.9",
        zip_safe=False
    )


if __name__ == "__main__":
    main()
