from hsa_calc.main import main

main()
