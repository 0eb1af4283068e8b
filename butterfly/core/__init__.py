# Portal model, engine and effect runners
