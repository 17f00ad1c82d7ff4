from review_action.main import run

run()
