"""
The shipped upgrade-cost table.

One line per row, one tab-separated column per upgrade. Row 0 is a
placeholder row of ones that never reaches the output; rows 1..20 are the
cost tiers, cheapest first. SENTINEL marks a tier that cannot be bought.
"""

SENTINEL = "18446744073709500000"

HEADER_ROWS = 1
EXPECTED_ROWS = 21
EXPECTED_COLUMNS = 11

UPGRADE_COST_TABLE = (
    # Placeholder; the tier rows below were pasted without one.
    "1\t1\t1\t1\t1\t1\t1\t1\t1\t1\t1\n"
    "0\t0\t0\t1080\t90\t270\t200\t600\t2000\t15000\t10000000\n"
    "30\t6\t18\t1728\t171\t405\t560\t18446744073709500000\t3400\t33000\t18446744073709500000\n"
    "62\t14\t40\t2765\t325\t608\t1568\t18446744073709500000\t5780\t72600\t18446744073709500000\n"
    "129\t33\t89\t4424\t617\t911\t4390\t18446744073709500000\t9826\t159720\t18446744073709500000\n"
    "266\t77\t197\t7078\t1173\t1367\t18446744073709500000\t18446744073709500000\t16704\t18446744073709500000\t18446744073709500000\n"
    "551\t176\t437\t18446744073709500000\t2228\t2050\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\n"
    "1140\t405\t971\t18446744073709500000\t4234\t3075\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\n"
    "2360\t933\t2155\t18446744073709500000\t8045\t4613\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\n"
    "4886\t2145\t4783\t18446744073709500000\t18446744073709500000\t6920\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\n"
    "10113\t4934\t10619\t18446744073709500000\t18446744073709500000\t10380\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\n"
    "18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\n"
    "18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\n"
    "18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\n"
    "18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\n"
    "18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\n"
    "18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\n"
    "18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\n"
    "18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\n"
    "18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\n"
    "18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\t18446744073709500000\n"
)
