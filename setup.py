"""Fastarith setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import fastarith

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='fastarith',
    version=fastarith.__version__,
    description='Fastarith -- Fast exact polynomial arithmetic via the transposition principle',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['polynomials', 'finite fields', 'transposition principle', 'middle product',
              'Berlekamp-Massey', 'composed product', 'computer algebra'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=fastarith.__license__,
    packages=['fastarith'],
    platforms=['any'],
    install_requires=['gmpy2', 'numpy'],
    python_requires='>=3.9'
)
