from vitegen.pipeline import main

main()
