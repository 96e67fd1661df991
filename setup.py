from setuptools import setup, find_packages
import os

def get_requirements():
    thelibFolder = os.path.dirname(os.path.realpath(__file__))
    requirementPath = thelibFolder + '/requirements.txt'
    if os.path.isfile(requirementPath):
        with open(requirementPath) as f:
            return [line for line in f.read().splitlines() if line and not line.startswith('#')]
    return []

setup(
    name='tauri-config-extractor',
    version='0.1.0',
    description='Generate pydantic validators for tauri.conf.json from the upstream JSON Schema',
    license='MIT',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    package_data={
        'tauri_config': ['pipelines/*.yaml', 'templates/*.j2'],
    },
    include_package_data=True,
    python_requires='>=3.9',
    install_requires=get_requirements(),
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Code Generators',
    ],
    entry_points={
        'console_scripts': [
            'tauri-config=tauri_config.cli:cli',
        ]
    },
)
