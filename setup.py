import setuptools


with open("README.md") as fp:
    long_description = fp.read()


setuptools.setup(
    name="idempotent_service_linked_role",
    version="0.0.1",
    description="Create an IAM service-linked role if it doesn't already exist, with the AWS CDK v2",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="",
    package_dir={},
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        # cdk v2
        "aws-cdk-lib>=2.110.0",
        "constructs>=10.0.0",
        # lambda runtime
        "boto3",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
        "dev": [
            "awscli",
            # for vscode
            "black",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: JavaScript",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Topic :: Utilities",
        "Typing :: Typed",
    ],
)
