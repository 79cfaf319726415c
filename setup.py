import setuptools

with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name='gmlab',
    version='0.1.0',
    author='GMLab Developers',
    description='Python tools for ground-motion evaluation',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(include=['gmlab', 'gmlab.*']),
    package_data={
        'gmlab.gmmodel.gmpe': ['data/*.json'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Operating System :: OS Independent',
        'Topic :: Scientific/Engineering',
        'Intended Audience :: Science/Research'
    ],
    python_requires='>=3.9',
    install_requires=[
        'setuptools',
        'numpy',
        'scipy'
    ],
    extras_require={
        'test': ['pytest']
    }
)
