from plan_ws.server import main

main()
