# type: ignore
from setuptools import find_packages, setup

# Get VERSION constant from vwo_openfeature_provider.version - we can't simply import that module because
# vwo_openfeature_provider/__init__.py imports openfeature, which may not be installed yet.
# Based on https://packaging.python.org/guides/single-sourcing-package-version/
version_module_globals = {}
with open('./vwo_openfeature_provider/version.py') as f:
    exec(f.read(), version_module_globals)
provider_version = version_module_globals['VERSION']


def parse_requirements(filename):
    """ load requirements from a pip requirements file """
    with open(filename) as f:
        lineiter = (line.strip() for line in f)
        return [line for line in lineiter if line and not line.startswith("#")]


install_reqs = parse_requirements('requirements.txt')
test_reqs = parse_requirements('test-requirements.txt')

setup(
    name='vwo-openfeature-provider',
    version=provider_version,
    packages=find_packages(include=['vwo_openfeature_provider', 'vwo_openfeature_provider.*']),
    description='OpenFeature provider for VWO Feature Management and Experimentation',
    long_description='OpenFeature provider for VWO Feature Management and Experimentation',
    install_requires=install_reqs,
    python_requires='>=3.8',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development',
        'Topic :: Software Development :: Libraries',
    ],
    extras_require={
        "test": test_reqs,
    },
)
