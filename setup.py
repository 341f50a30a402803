"""
Setup file for walmart_dashboard package - Prepares Walmart sales data for the analytics dashboard
--------------------------------
Loads the weekly sales CSV, cleans it and computes the dashboard tables.
"""


from setuptools import setup, find_packages

setup(
    name="walmart_dashboard",
    version="0.1.0",
    description="Data pipeline behind the Walmart sales analytics dashboard",  # Brief description
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",  #  minimum Python version
    install_requires=[
        "pandas>=1.4.0",  #  on_bad_lines callable needs 1.4
        "numpy>=1.21.0",
        "google-cloud-storage>=2.0.0",
        "google-api-core>=2.0.0",  #  GoogleAPIError caught on download
        "google-auth>=2.0.0",  #  GoogleAuthError caught on client creation
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-mock>=3.10.0",
            "psutil>=5.9.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
    ],
)
