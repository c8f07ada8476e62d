import os.path

from setuptools import setup

VERSION = "0.1.0"

version_path = os.path.join(os.path.dirname(__file__), 'uconline', '_version.py')
if not os.path.exists(version_path):
    with open(version_path, "w") as version_file:
        pass
with open(version_path, "r+") as version_file:
    version_content = "__version__ = %r" % (VERSION,)
    if version_file.read() != version_content:
        version_file.seek(0)
        version_file.write(version_content)
        version_file.flush()
        version_file.truncate()

with open(os.path.join(os.path.dirname(__file__), 'README.rst')) as readme_file:
    readme = readme_file.read()

with open(os.path.join(os.path.dirname(__file__), 'requirements.txt')) as requirements_file:
    requirements = list(filter(bool, [ r.strip() for r in requirements_file if not r.startswith('#') ]))

packages = [
    "uconline",
    "uconline.cmd",
    "uconline.cmd.commands",
    "uconline.config",
    "uconline.config.profiles",
    "uconline.config.store",
    "uconline.util",
]


setup(
    name = "uconline",
    version = VERSION,
    description = "INI configuration store for the uc-online launcher",
    long_description = readme,
    long_description_content_type = "text/x-rst",
    packages = packages,
    python_requires = ">=3.7",

    install_requires = requirements,
    extras_require = {
        'test': ['pytest'],
    },

    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
        "Operating System :: OS Independent",
    ],
)
