from .MPC import MPC


ONE = MPC.mpz(1)
TWO = MPC.mpz(2)
