"""
setup.py for the reaction-diffusion package.

viewer.py requires pygame, which headless installs (snap mode, tests)
do not need. It stays in the wheel but pygame is only pulled in by the
"viewer" extra; __main__ imports it lazily.
"""

from setuptools import setup


setup(
    name="reaction-diffusion",
    version="0.1.0",
    description="Gray-Scott reaction-diffusion simulation with a pygame viewer",
    package_dir={"": "plugins"},
    packages=["reaction_diffusion"],
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "scipy",
        "Pillow>=9.1",
    ],
    extras_require={
        "viewer": ["pygame"],
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "reaction-diffusion=reaction_diffusion.__main__:main",
        ],
    },
)
