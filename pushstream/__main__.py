from pushstream.demo import app

app(prog_name="pushstream")
