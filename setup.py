from setuptools import setup, find_packages
import re

# Read version from gdp/__init__.py
with open('gdp/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='gdrive-projects',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.9',
    install_requires=[
        'google-api-python-client',
        'google-auth',
        'python-dotenv',
        'click>=8.0',
        'PyYAML',
        'mcp>=1.0.0,<2',
    ],
    extras_require={
        'mcp': ['mcp>=1.0.0,<2'],
        'test': ['pytest', 'httplib2'],
    },
    entry_points={
        'console_scripts': [
            'gdp=gdp.cli.__main__:main',
            'gdp-mcp=gdp.mcp.server:run_server',
        ],
    },
    author='CLI Developer',
    description='Google Drive document projects - SDK, CLI, and MCP server for Drive-backed writing projects.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
