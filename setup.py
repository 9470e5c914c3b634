# -*- coding: utf-8 -*-
"""
Setup for the tfljourneys package
"""


from setuptools import setup, find_packages

with open('README.rst', 'r') as f:
    long_description = f.read()


setup(name='tfljourneys',
      version='0.1.0',
      description='Package for analysing TfL oyster and contactless journey history',
      long_description=long_description,
      long_description_content_type="text/x-rst",
      package_dir = {'tfljourneys':'tfljourneys'},
      packages = find_packages(),
      package_data={
          'tfljourneys': [
              'resources/config/*.ini'
              ]
          },
      python_requires='>=3.9',
      install_requires=['pandas', 'numpy', 'matplotlib', 'tqdm'],
      extras_require={'test': ['pytest']},
      include_package_data=True,
      zip_safe=False)
