from setuptools import setup, find_packages
import funge


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='funge',
    description="An interpreter for the two dimensional befunge language "
                "implemented in pure Python",
    long_description=long_description,
    version=funge.__version__,
    author='Oreoluwa Babarinsa',
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    package_data={'': ["*.rst"]},
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'funge-run = funge.cli.run:run',
            'funge-show = funge.cli.show:show',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Interpreters',
    ]
)
