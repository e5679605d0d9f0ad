import os
import re

from setuptools import setup


def get_version():
    module_init = 'colorskit/version.py'

    if not os.path.isfile(module_init):
        module_init = '../' + module_init
        if not os.path.isfile(module_init):
            raise ValueError('Unable to determine version!')

    with open(module_init) as version_file:
        return re.search(r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
                         version_file.read()).group(1)


setup(name='colorskit',
      version=get_version(),
      description='Color conversion, contrast and harmony palette generation',
      license='LGPL',
      packages=['colorskit'],
      python_requires='>=3.8',
      install_requires=['coloraide', 'colorlog', 'numpy', 'wrapt'],
      extras_require={
          'test': ['pytest']
      },
      keywords='color palette harmony analogous tetradic contrast luminance',
      include_package_data=True,
      zip_safe=False,
      classifiers=[
          'Development Status :: 3 - Alpha',
          'Intended Audience :: Developers',
          'Topic :: Multimedia :: Graphics',
          'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
          'Programming Language :: Python :: 3 :: Only',
          'Topic :: Software Development :: Libraries'
      ])
