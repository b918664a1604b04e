"""
Setup script for the Text Intelligence backend.
"""
from setuptools import setup, find_packages

setup(
    name='text-intelligence-backend',
    version='1.0.0',
    description='Session-gated backend relaying text analysis requests to Deepgram Text Intelligence',
    packages=find_packages(include=['app', 'app.*', 'services', 'services.*', 'utils', 'utils.*']),
    py_modules=['config', 'main'],
    install_requires=[
        'Flask>=3.0.0',
        'Flask-CORS>=4.0.0',
        'Flask-JWT-Extended>=4.6.0',
        'flask-sock>=0.7.0',
        'simple-websocket>=1.0.0',
        'python-dotenv>=1.0.0',
        'pydantic>=2.5.0',
        'httpx>=0.25.0',
        'gunicorn>=21.2.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.4.0',
        ],
    },
    python_requires='>=3.11',
)
