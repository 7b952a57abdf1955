#!/usr/bin/env python

from setuptools import setup, find_packages

# keep in step with wwwauth.__version__
VERSION = "1.0.0"

setup(name='wwwauth',
      version=VERSION,
      description='Parse and serialise HTTP WWW-Authenticate Digest challenges.',
      long_description=open("README.md").read(),
      long_description_content_type="text/markdown",
      license = "MIT",
      packages=find_packages(include=['wwwauth', 'wwwauth.*']),
      scripts=['bin/wwwauth'],
      python_requires=">=3.7",
      install_requires=[
          'markdown >= 3.0',
          'markupsafe >= 2.0',
          'typing_extensions >= 3.7.4'
      ],
      extras_require={
          'dev': [
          'mypy',
          'pytest'
          ]
      },
      classifiers=[
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: MIT License',
      ],
)
