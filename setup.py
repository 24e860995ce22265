"""Package setup for wp_ajax_probe."""

from setuptools import setup, find_packages

setup(
    name="wp-ajax-probe",
    version="1.0.0",
    description="Lightweight WordPress admin-ajax.php endpoint probe",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=5.0.0",
        "urllib3>=2.0.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "wp-ajax-probe=wp_ajax_probe.cli:main",
        ],
    },
)
