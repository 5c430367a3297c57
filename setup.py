from setuptools import setup, find_packages

# pytest kept with the install dependencies as it is lightweight.
setup(name="hvec", version=0.1, description="Homogeneous-coordinate vector algebra for 3D geometry",
      packages=find_packages(include=['hvec', 'hvec.*']),
      install_requires=['numpy', 'numba', 'pyyaml', 'pytest'], python_requires='>=3.7')
