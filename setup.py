#!/usr/bin/env python

import timeit
from setuptools import setup, Command

class Speed(Command):
    description = "run speed benchmarks"
    user_options = []
    boolean_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        def do(setup_statements, statement):
            # extracted from timeit.py
            t = timeit.Timer(stmt=statement,
                             setup="\n".join(setup_statements))
            # determine number so that 0.2 <= total time < 2.0
            for i in range(1, 10):
                number = 10**i
                x = t.timeit(number)
                if x >= 0.2:
                    break
            return x / number

        def abbrev(t):
            if t > 1.0:
                return "%.3fs" % t
            if t > 1e-3:
                return "%.1fms" % (t*1e3)
            return "%.1fus" % (t*1e6)

        for suite in ["SuiteEd25519"]:
            S1 = "from spake2rfc import SPAKE2_A, SPAKE2_B, %s" % suite
            S2 = "sB = SPAKE2_B(b'password', suite=%s)" % suite
            S3 = "mB = sB.start()"
            S4 = "sA = SPAKE2_A(b'password', suite=%s)" % suite
            S5 = "mA = sA.start()"
            S8 = "key, confirm = sA.finish(mB)"

            full = do([S1, S2, S3], ";".join([S4, S5, S8]))
            start = do([S1], ";".join([S4, S5]))
            # how large are the generated messages?
            from spake2rfc import SPAKE2_A, SPAKE2_B
            sA, sB = SPAKE2_A(b"pw"), SPAKE2_B(b"pw")
            mA = sA.start()
            key, confirm = sA.finish(sB.start())
            print("%-13s: msglen=%3d, confirmlen=%3d, full=%6s, start=%6s"
                  % (suite, len(mA), len(confirm), abbrev(full),
                     abbrev(start)))

setup(name="spake2rfc",
      version="0.1.0",
      description="SPAKE2 password-authenticated key exchange with key confirmation",
      package_dir={"": "src"},
      packages=["spake2rfc", "spake2rfc.parameters", "spake2rfc.test"],
      license="MIT",
      cmdclass={"speed": Speed},
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Security :: Cryptography",
          ],
      python_requires=">=3.7",
      install_requires=["hkdf", "pynacl>=1.4.0"],
      )
