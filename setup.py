from setuptools import setup

setup(name='dagsort',
      version='0.1.0',
      description='Topologically sort caller-defined directed graphs',
      license='MIT',
      packages=['dagsort'],
      python_requires='>=3.7',
      entry_points={
          'console_scripts': ['dagsort=dagsort.__main__:main'],
      })
