from setuptools import setup, find_packages
import codecs
import os

here = os.path.abspath(os.path.dirname(__file__))

with codecs.open(os.path.join(here, "README.md"), encoding="utf-8") as fh:
    long_description = "\n" + fh.read()

VERSION = '0.0.1'
DESCRIPTION = 'Lofted Bezier petal cone meshes with smooth normals'

# Setting up
setup(
    name="petalcone",
    version=VERSION,
    description=DESCRIPTION,
    long_description_content_type="text/markdown",
    long_description=long_description,
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=['numpy>=1.20'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.8',
    entry_points={'console_scripts': ['petalcone=petalcone.__main__:main']},
    keywords=['python', 'three dimensional', 'bezier', 'mesh', 'loft', '3d'],
    classifiers=[
        "Development Status :: 1 - Planning",
        "Intended Audience :: Developers",
        "Intended Audience :: Designers",
        "Programming Language :: Python :: 3",
        "Operating System :: Unix",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: Microsoft :: Windows",
    ]
)
