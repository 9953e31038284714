from setuptools import setup
import codecs
import os


VERSION = '0.1.0'

_here = os.path.abspath(os.path.dirname(__file__))


def read(relative_path):
    """Reads file at relative path, returning contents as string."""
    with codecs.open(os.path.join(_here, relative_path), "rb", "utf-8") as f:
        return f.read()


setup(name='lhopital',
      packages=['lhopital'],
      version=VERSION,
      description=("Limits of quotients of one-variable expressions by "
                   "L'Hopital's rule, with symbolic differentiation."),
      long_description=read("README.md"),
      long_description_content_type='text/markdown',
      license='MIT',
      install_requires=['numpy'],
      python_requires='>=3.7',
      platforms="OS Independent",
      keywords=['limit', "l'hopital", 'derivative', 'symbolic',
                'expression tree', 'calculus'],
      classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "Intended Audience :: Education",
            "License :: OSI Approved :: MIT License",
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3",
            "Topic :: Scientific/Engineering",
            "Topic :: Scientific/Engineering :: Mathematics",
            "Topic :: Software Development :: Libraries :: Python Modules",
            ],
      )
