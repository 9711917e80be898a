"Setup script for the tagsmith package"

import sys
from setuptools import setup, find_packages

if not sys.version_info >= (3, 6):
    raise RuntimeError('This library requires Python 3.6 or later')


def main():
    "Executes setup when this script is the top-level"
    import tagsmith as app
    from pathlib import Path

    with Path(__file__).with_name('README.rst').open() as readme:
        setup(
            name=app.__project__,
            version=app.__version__,
            description=' '.join(app.__doc__.split('.')[0].split()),
            long_description=readme.read(),
            classifiers=app.__classifiers__,
            author=app.__author__,
            author_email=app.__author_email__,
            license=[
                c.rsplit('::', 1)[1].strip()
                for c in app.__classifiers__
                if c.startswith('License ::')
            ][0],
            keywords=app.__keywords__,
            packages=find_packages(exclude=['tests', 'tests.*']),
            include_package_data=True,
            platforms=app.__platforms__,
            python_requires='>=3.6',
            install_requires=app.__requires__,
            extras_require=app.__extra_requires__,
            entry_points=app.__entry_points__,
        )


if __name__ == '__main__':
    main()
