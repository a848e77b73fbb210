from setuptools import setup
from setuptools.command.develop import develop
from setuptools.command.install import install
import write_config
import sys
import re

if sys.version_info[0] == 2:
    sys.exit("Sorry, Python 2 is not supported.")


def obtain_version():
    """
    Obtains the version as specified in ratfun.
    :return: Version of ratfun.
    """
    verstr = "unknown"
    try:
        verstrline = open('ratfun/_version.py', "rt").read()
    except EnvironmentError:
        pass  # Okay, there is no version file.
    else:
        VSRE = r"^__version__ = ['\"]([^'\"]*)['\"]"
        mo = re.search(VSRE, verstrline, re.M)
        if mo:
            verstr = mo.group(1)
        else:
            raise RuntimeError("unable to find version in ratfun/_version.py")
    return verstr


class ConfigDevelop(develop):
    """
    Custom command to write the config file after installation
    """
    user_options = develop.user_options + [
        ('tolerance=', None, 'Tolerance below which denominators count as zero'),
    ]

    def initialize_options(self):
        develop.initialize_options(self)
        self.tolerance = None

    def finalize_options(self):
        develop.finalize_options(self)

    def run(self):
        develop.run(self)
        write_config.write_initial_config(self.tolerance)


class ConfigInstall(install):
    """
    Custom command to write the config file after installation
    """

    user_options = install.user_options + [
        ('tolerance=', None, 'Tolerance below which denominators count as zero'),
    ]

    def initialize_options(self):
        install.initialize_options(self)
        self.tolerance = None

    def finalize_options(self):
        install.finalize_options(self)

    def run(self):
        install.run(self)
        write_config.write_initial_config(self.tolerance)


setup(
    name="Ratfun",
    version=obtain_version(),
    description="Ratfun - Evaluation of linear and quadratic rational functions",
    packages=["ratfun", "ratfun.data", "ratfun.exceptions", "ratfun.input", "ratfun.output"],
    py_modules=["write_config"],
    install_requires=['numpy', 'click'],
    tests_require=['pytest'],
    extras_require={
        'test': ["pytest"],
    },
    package_data={
        'ratfun': ['ratfun.cfg'],
    },
    scripts=[
        'scripts/evaluate_function.py'],
    cmdclass={
        'develop': ConfigDevelop,
        'install': ConfigInstall,
    }
)
